"""Data models shared by the index builder and the server."""
