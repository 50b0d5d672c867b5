"""Infrastructure shared by the API client packages."""
