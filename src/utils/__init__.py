# Utils package

from .error_handling import handle_service_errors, safe_execute

__all__ = ['handle_service_errors', 'safe_execute']
