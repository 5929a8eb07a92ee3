"""bookmarks_api package."""
