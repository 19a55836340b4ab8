"""Development server exposing the content index over HTTP."""
