"""
Test suite for deviceid.

Focus areas:
- Order independence of component combination
- Exact bytes fed to the hash engine
- Hash engine lifecycle on success and failure
- Encoders, configuration and CLI
"""
