"""
cmdig - Cloud Monitoring dashboard digger

Fuzzy-pick a Cloud Monitoring dashboard for a project and open it in
the browser.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from cmdig.core.config.models import DigConfig
from cmdig.core.dashboards.models import DashboardEntry

__all__ = ["DashboardEntry", "DigConfig", "__version__"]
