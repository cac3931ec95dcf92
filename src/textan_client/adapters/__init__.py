"""Host adapters that render the wizard with a concrete UI toolkit."""
