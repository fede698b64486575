"""ICD-10 Code Predictor backend."""

__version__ = "0.1.0"
