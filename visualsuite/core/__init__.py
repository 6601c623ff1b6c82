"""Core domain layer: exceptions, prompt templates, fallbacks and throttling."""
