"""Service layer: LLM access and the document generation engine."""
