"""Output layer — Rich and JSON presentation of ServiceResult."""
