"""Stand-ins for the google-generativeai objects used by the clients layer."""


class FakeResponse:
    def __init__(self, text=None, raise_on_text=False):
        self._text = text
        self._raise_on_text = raise_on_text

    @property
    def text(self):
        if self._raise_on_text:
            # What the SDK does when a reply has no parts
            raise ValueError("The `response.text` quick accessor requires a valid Part.")
        return self._text


class FakePart:
    def __init__(self, text):
        self.text = text


class FakeContent:
    def __init__(self, role, text):
        self.role = role
        self.parts = [FakePart(text)]


class FakeChat:
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.sent = []
        self.history = []
        self.rewind_calls = 0

    def send_message(self, message):
        self.sent.append(message)
        if self.error:
            raise self.error
        self.history.extend([FakeContent("user", message), FakeContent("model", self.reply)])
        return FakeResponse(self.reply)

    def rewind(self):
        self.rewind_calls += 1
        self.history = self.history[:-2]


class FakeModel:
    def __init__(self, response=None, error=None, chat=None):
        self.response = response if response is not None else FakeResponse("")
        self.error = error
        self.chat = chat or FakeChat()
        self.calls = []

    def generate_content(self, contents, generation_config=None):
        self.calls.append({"contents": contents, "generation_config": generation_config})
        if self.error:
            raise self.error
        return self.response

    def start_chat(self):
        return self.chat


class FakeModelFactory:
    """Records every (api_key, model_name, system_instruction) it is asked for."""

    def __init__(self, model):
        self.model = model
        self.created = []

    def __call__(self, api_key, model_name, system_instruction):
        self.created.append(
            {"api_key": api_key, "model_name": model_name, "system_instruction": system_instruction}
        )
        return self.model


