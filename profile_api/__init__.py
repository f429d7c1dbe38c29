"""profile-api: the authenticated caller's profile over a JSON envelope API."""
