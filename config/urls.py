"""Centralized URLs for external integrations."""

from __future__ import annotations

ABS_DATA_API_URL = "https://data.api.abs.gov.au/rest/data"
ABS_SDMX_ACCEPT = "application/vnd.sdmx.data+json;version=1.0.0-wd"
