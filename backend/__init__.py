"""Flask backend for the React + Flask starter."""
