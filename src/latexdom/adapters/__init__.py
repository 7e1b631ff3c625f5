"""Adapters bridging the document model to output formats."""
