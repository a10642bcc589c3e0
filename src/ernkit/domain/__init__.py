"""Pure domain layer: model, classification, contributor mapping and generation."""
