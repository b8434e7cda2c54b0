"""Configuration"""

# Logging
LOGGING_CONFIG = {
    "level": "WARNING",
    "verbose_level": "DEBUG",  # --verbose: shunting-yard trace
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# Result printing
OUTPUT_CONFIG = {
    "precision": 7,  # significant digits; float32 carries about 7
    "error_prefix": "Error: ",
    "rpn_prefix": "RPN: ",
}


def validate_config():
    """Sanity-check the configuration values"""
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    assert LOGGING_CONFIG["verbose_level"] in ("DEBUG", "INFO")
    assert OUTPUT_CONFIG["precision"] >= 1, "precision must be positive"
    return True
