"""Core engine components: class merging, variants, cascade and the element adapter."""
