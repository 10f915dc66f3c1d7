__version__ = "0.3"
__release__ = "0.3.0"
