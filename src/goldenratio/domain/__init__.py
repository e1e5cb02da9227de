"""Domain layer: pure geometry and command matching, no host access."""
