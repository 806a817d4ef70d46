"""Core reconciliation logic: template loading and mismatch detection."""
