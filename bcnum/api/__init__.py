"""HTTP host adapter for the bcnum engine."""
