"""
Static Controller - Serves the pre-built frontend bundle
"""
import os

from flask import send_from_directory


class StaticController:
    """Serves bundle files, falling back to index.html for client-side routes"""

    def __init__(self, static_folder: str):
        self.static_folder = static_folder

    def serve(self, path: str = ''):
        if path and os.path.isfile(os.path.join(self.static_folder, path)):
            return send_from_directory(self.static_folder, path)
        return send_from_directory(self.static_folder, 'index.html')
