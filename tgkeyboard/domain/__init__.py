"""Platform-independent keyboard grid model."""
