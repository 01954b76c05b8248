"""Tag services: prefix discovery, latest-tag resolution, bump, setup."""
