"""Finance — present-value discounting and sensitivity views over the engine."""
