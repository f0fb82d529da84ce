"""Application layer: read models returned by the content repositories."""
