"""Table model"""
from .model import DataTable, Row
