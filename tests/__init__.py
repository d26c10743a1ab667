"""
Tests for geojson-validators.

Test modules:
- test_validators.py: Position, CRS, geometry, feature and dispatch validation
- test_cast.py: Raising cast functions
- test_fields.py: Pydantic field types
- test_errors.py: Error kinds, exceptions and error responses
- test_logger.py: Log formatting and validation call logging
- test_config.py: Settings and environment overrides

Running tests:
    # Run all tests
    pytest tests/ -v

    # Run specific test file
    pytest tests/test_validators.py -v

    # Run with coverage
    pytest tests/ --cov=geojson_validators --cov-report=term-missing
"""
