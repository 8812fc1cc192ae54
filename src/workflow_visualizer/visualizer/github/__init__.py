"""GitHub API access for fetching workflow files."""
