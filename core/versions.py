APP_VERSION = "0.1.0"
ENGINE_VERSION = "0.1.0"
PARAMS_SCHEMA_VERSION = "v1"
REFERENCE_FORMAT_VERSION = "v1"


# =============================================================================
# Version Catalog
# =============================================================================
# Name                      | Meaning                          | Changes when…
# ------------------------- | -------------------------------- | -----------------------------------------
# APP_VERSION               | overall app/package version      | you ship a release
# ENGINE_VERSION            | resolver + ranking behaviour     | search stages or ranking rules change
# PARAMS_SCHEMA_VERSION     | request/response shape           | you add/remove/rename request fields
# REFERENCE_FORMAT_VERSION  | reference data file formats      | dictionary/frequency/variant formats change
# =============================================================================
# Observability: all of them are returned by GET / and logged at startup.
# =============================================================================


def version_info() -> dict[str, str]:
    return {
        "app_version": APP_VERSION,
        "engine_version": ENGINE_VERSION,
        "params_schema_version": PARAMS_SCHEMA_VERSION,
        "reference_format_version": REFERENCE_FORMAT_VERSION,
    }
