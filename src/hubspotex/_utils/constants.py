# Environment variables
ENV_BASE_URL = "HUBSPOT_BASE_URL"
