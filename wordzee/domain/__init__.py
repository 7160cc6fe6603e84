"""Pure domain rules: word normalization and rack matching."""
