"""HTTP API for the Kids News Generator."""
