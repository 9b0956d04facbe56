"""selffit: personal workout scheduling tracker."""

__version__ = "0.1.0"
