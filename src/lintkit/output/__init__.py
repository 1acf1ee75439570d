"""Output layer — SARIF models/encoding and Rich rendering for humans."""
