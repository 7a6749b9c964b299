"""Value inference and rendering"""
from .inference import (
    infer_value,
    parse_boolean,
    parse_number,
    parse_timestamp,
    revive_timestamps,
    INFERENCE_RULES,
)
from .codec import TaggedValue, as_tagged, render_value, render_timestamp, json_default
