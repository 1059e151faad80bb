"""Modern patterns - in common use, but not part of the GoF catalogue."""
