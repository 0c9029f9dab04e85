"""Host adapters that present a tracker in a UI toolkit."""
