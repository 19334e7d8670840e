"""Reserved-name detection, safety checks and the sanitizing pipeline."""
