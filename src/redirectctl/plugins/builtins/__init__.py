"""Built-in plugins shipped with redirectctl."""
