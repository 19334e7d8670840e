"""Static rule tables and policy value types."""
