"""API Gateway and EventBridge handlers."""
