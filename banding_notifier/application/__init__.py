"""Application layer: orchestration across channels."""
