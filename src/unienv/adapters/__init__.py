"""Host adapters implementing the core HostPort for each interpreter."""
