"""
Greeting Controller - Demo endpoints with no storage side effects
"""
from . import json_body


class GreetingController:
    """Controller for the /hello endpoints"""

    def hello(self):
        return 'Hello There!'

    def hello_from_body(self):
        """Greet the name posted as JSON, e.g. {"name": "Paul"}"""
        data = json_body()
        return f"Hello {data.get('name', '')}"

    def hello_name(self, name: str):
        return f'Hello {name}'
