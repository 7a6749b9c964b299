"""Test value rendering."""
import json
from datetime import date, datetime, timedelta, timezone

import pytest

from tablewarp.values import TaggedValue, as_tagged, infer_value, json_default, render_value


class TestRenderValue:

    def test_none_is_omitted(self):
        assert render_value(None) is None

    def test_booleans_lowercase(self):
        assert render_value(True) == 'true'
        assert render_value(False) == 'false'

    @pytest.mark.parametrize('value,expected', [
        (42, '42'), (1.0, '1'), (-3.5, '-3.5'), (0.1, '0.1'), (0, '0'),
    ])
    def test_numbers(self, value, expected):
        assert render_value(value) == expected

    def test_non_finite_numbers(self):
        assert render_value(float('nan')) == 'NaN'
        assert render_value(float('inf')) == 'Infinity'
        assert render_value(float('-inf')) == '-Infinity'

    def test_timestamp_fraction_normalized(self):
        value = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert render_value(value) == '2020-01-02T03:04:05.000Z'

    def test_timestamp_milliseconds(self):
        value = datetime(2020, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
        assert render_value(value) == '2020-01-02T03:04:05.123Z'

    def test_timestamp_converted_to_utc(self):
        value = datetime(2020, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert render_value(value) == '2020-01-02T03:04:05.000Z'

    def test_naive_timestamp_taken_as_utc(self):
        assert render_value(datetime(2020, 1, 2)) == '2020-01-02T00:00:00.000Z'

    def test_date(self):
        assert render_value(date(2020, 1, 2)) == '2020-01-02T00:00:00.000Z'

    def test_tagged_renders_inner_value(self):
        assert render_value(TaggedValue('account', 42)) == '42'
        assert render_value({'type': 'account', 'value': True}) == 'true'

    def test_tagged_none_is_omitted(self):
        assert render_value(TaggedValue('account', None)) is None

    def test_strings_unchanged(self):
        assert render_value('hi') == 'hi'


class TestRenderInvertsInference:

    @pytest.mark.parametrize('text', ['true', 'false', '42', '-3.5', '2020-01-02T03:04:05.000Z'])
    def test_round_trip(self, text):
        assert render_value(infer_value(text)) == text

    def test_uppercase_boolean_normalized(self):
        assert render_value(infer_value('TRUE')) == 'true'

    def test_timestamp_without_fraction_normalized(self):
        assert render_value(infer_value('2020-01-02T03:04:05Z')) == '2020-01-02T03:04:05.000Z'

    def test_number_normalized(self):
        assert render_value(infer_value('1.0')) == '1'

    def test_year_before_1000_zero_padded(self):
        assert render_value(infer_value('0999-01-02T03:04:05.000Z')) == '0999-01-02T03:04:05.000Z'


class TestAsTagged:

    def test_tagged_value(self):
        tagged = TaggedValue('account', 'abc')
        assert as_tagged(tagged) is tagged

    def test_mapping_with_type(self):
        assert as_tagged({'type': 'account', 'value': 1}) == TaggedValue('account', 1)

    def test_not_tagged(self):
        assert as_tagged({'value': 1}) is None
        assert as_tagged({'type': None, 'value': 1}) is None
        assert as_tagged('account') is None


class TestJsonDefault:

    def test_timestamp_and_tagged(self):
        payload = {
            'when': datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            'owner': TaggedValue('systemuser', 'abc'),
        }
        text = json.dumps(payload, default=json_default)
        assert json.loads(text) == {
            'when': '2020-01-02T03:04:05.000Z',
            'owner': {'type': 'systemuser', 'value': 'abc'},
        }

    def test_unknown_type_raises(self):
        with pytest.raises(TypeError):
            json.dumps({'x': object()}, default=json_default)
