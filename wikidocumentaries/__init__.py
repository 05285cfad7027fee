"""Wikidocumentaries — Wikipedia excerpts and Wikidata lookups for the viewer."""
