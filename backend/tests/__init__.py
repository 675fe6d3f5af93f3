"""
Mystery Mansion Test Suite

Test structure:
- unit/: Test components in isolation with mocks
- integration/: Test the turn processor end to end with a mocked reinterpreter
- mocks/: Mock implementations for testing
"""
