"""DynamoDB entity mappings and repositories."""
