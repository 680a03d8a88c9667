"""
yaft – decoration-time feature toggles.

Import path convention::

    from yaft.application.toggles import feature_toggle, set_flag_store
    from yaft.application.toggles import RecordFlagStore, BooleanFlagStore
    from yaft.adapters.sources import JsonFileFlagSource, ApiFlagSource
    from yaft.kernel.errors import ConfigurationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
