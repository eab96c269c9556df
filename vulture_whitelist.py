"""Vulture whitelist for false positives.

Names used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.ensure_utc  # noqa: F821  # unused method (milo/core/types.py)
_.expand_user  # noqa: F821  # unused method (milo/core/config.py)

# Pydantic model_config class variable - read by framework at class definition time
model_config  # noqa: F821  # unused variable (milo/core/types.py)

# logging.Handler hook - called by the standard-library logging machinery
_.emit  # noqa: F821  # unused method (milo/utils/logging.py)
