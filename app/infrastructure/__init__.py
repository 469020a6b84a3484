"""Infrastructure modules for the Smart IP library.

Centralized infrastructure components:
- configuration: Settings management (Settings, MaxMindSettings, SmartIpSettings)
- clients: External integrations (MaxMindClient)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results (OperationResult, OperationStatus)
- services: Application-scoped providers (get_settings, get_maxmind_client)
"""
