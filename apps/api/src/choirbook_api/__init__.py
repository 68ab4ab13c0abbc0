"""HTTP API for the Choirbook calendar and audio bookmarks."""
