from crackmes.challenge import Challenge

QUIT_KEYS = {"q", "esc"}
NEXT_KEYS = {"j", "down"}
PREV_KEYS = {"k", "up"}
DOWNLOAD_KEYS = {"d", "enter", ""}


class Browser:
    """Selection state for the result list. Rendering and I/O live in the CLI."""

    def __init__(self):
        self.challenges: list[Challenge] = []
        self.selected_index = 0
        self.status = "Loading challenges..."
        self.should_quit = False
        self.should_download = False

    def set_challenges(self, challenges: list[Challenge]) -> None:
        self.challenges = list(challenges)
        self.selected_index = 0
        if self.challenges:
            self.status = f"{len(self.challenges)} challenges found"
        else:
            self.status = "No challenges found"

    def next(self) -> None:
        if self.challenges:
            self.selected_index = (self.selected_index + 1) % len(self.challenges)

    def previous(self) -> None:
        if self.challenges:
            self.selected_index = (self.selected_index - 1) % len(self.challenges)

    def selected(self) -> Challenge | None:
        if 0 <= self.selected_index < len(self.challenges):
            return self.challenges[self.selected_index]
        return None

    def request_download(self) -> None:
        if self.selected() is not None:
            self.should_download = True

    def clear_download(self) -> None:
        self.should_download = False

    def quit(self) -> None:
        self.should_quit = True

    def handle_key(self, key: str) -> None:
        key = key.strip().lower()
        if key in QUIT_KEYS:
            self.quit()
        elif key in NEXT_KEYS:
            self.next()
        elif key in PREV_KEYS:
            self.previous()
        elif key in DOWNLOAD_KEYS:
            self.request_download()
