import logging
import os

from hypothesis import HealthCheck, settings

# Test configuration - allow override via environment variables
HYPOTHESIS_PROFILE = os.environ.get("EBCDICIO_HYPOTHESIS_PROFILE", "default")

settings.register_profile("ci", max_examples=500, deadline=None)
settings.register_profile(
    "quick", max_examples=20, suppress_health_check=[HealthCheck.too_slow]
)
if HYPOTHESIS_PROFILE != "default":
    settings.load_profile(HYPOTHESIS_PROFILE)

logger = logging.getLogger(__name__)
logger.debug(f"Hypothesis profile: {HYPOTHESIS_PROFILE}")
