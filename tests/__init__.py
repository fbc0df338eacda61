"""
Travel Booking Assistant tests.

Running Tests:
    # Run all tests
    pytest tests -v

    # Run one module
    pytest tests/unit/test_conversation_flow.py -v

Test Coverage:
    - Keyword classification
    - Date parsing and calendar validation
    - Workflow catalog
    - Session store
    - Dialogue state machine
    - HTTP API
"""
