"""matchsight: exploratory analysis and rule-based selection for sports-prediction CSVs."""

__version__ = "0.1.0"
