"""AWS service integrations."""
