"""
Adapter makes an existing class usable through an interface it does not
implement.

The audio player only understands ``play(audio_type, file_name)`` and only
plays mp3 natively. The advanced players have their own, different methods.
``MediaAdapter`` sits between the two and translates the call.
"""
from abc import ABC, abstractmethod

from pattern_catalog.catalog.registry import register_pattern
from pattern_catalog.domain.console import Console
from pattern_catalog.domain.entry import Category

PATTERN_KEY = "adapter"

DIAGRAM = """
+-----------------+        +-----------------+       +--------------------------+
| <<MediaPlayer>> |<-------|  MediaAdapter   |------>| <<AdvancedMediaPlayer>>  |
+-----------------+        +-----------------+       +--------------------------+
| play(type, f)   |        | play(type, f)   |       | play_vlc(f) play_mp4(f)  |
+-----------------+        +-----------------+       +--------------------------+
        ^                                                 ^               ^
        |                                                 |               |
+-----------------+                               +-----------+   +-----------+
|   AudioPlayer   |                               | VlcPlayer |   | Mp4Player |
+-----------------+                               +-----------+   +-----------+
"""


class MediaPlayer(ABC):
    """Target interface."""

    @abstractmethod
    def play(self, audio_type: str, file_name: str) -> None:
        pass


class AdvancedMediaPlayer(ABC):
    """Adaptee interface."""

    @abstractmethod
    def play_vlc(self, file_name: str) -> None:
        pass

    @abstractmethod
    def play_mp4(self, file_name: str) -> None:
        pass


class VlcPlayer(AdvancedMediaPlayer):
    def __init__(self, console: Console):
        self.console = console

    def play_vlc(self, file_name: str) -> None:
        self.console.write(f"Playing vlc file. Name: {file_name}")

    def play_mp4(self, file_name: str) -> None:
        pass


class Mp4Player(AdvancedMediaPlayer):
    def __init__(self, console: Console):
        self.console = console

    def play_vlc(self, file_name: str) -> None:
        pass

    def play_mp4(self, file_name: str) -> None:
        self.console.write(f"Playing mp4 file. Name: {file_name}")


class MediaAdapter(MediaPlayer):
    def __init__(self, audio_type: str, console: Console):
        if audio_type == "vlc":
            self.advanced_player: AdvancedMediaPlayer = VlcPlayer(console)
        elif audio_type == "mp4":
            self.advanced_player = Mp4Player(console)
        else:
            raise ValueError(f"No advanced player for {audio_type}")

    def play(self, audio_type: str, file_name: str) -> None:
        if audio_type == "vlc":
            self.advanced_player.play_vlc(file_name)
        elif audio_type == "mp4":
            self.advanced_player.play_mp4(file_name)


class AudioPlayer(MediaPlayer):
    ADAPTED_FORMATS = ("vlc", "mp4")

    def __init__(self, console: Console):
        self.console = console

    def play(self, audio_type: str, file_name: str) -> None:
        if audio_type == "mp3":
            self.console.write(f"Playing mp3 file. Name: {file_name}")
        elif audio_type in self.ADAPTED_FORMATS:
            MediaAdapter(audio_type, self.console).play(audio_type, file_name)
        else:
            self.console.write(f"Invalid media. {audio_type} format not supported")


@register_pattern(PATTERN_KEY, "Adapter", Category.STRUCTURAL,
                  "Convert one interface into another that clients expect.", DIAGRAM)
def demo(console: Console) -> None:
    player = AudioPlayer(console)
    player.play("mp3", "beyond the horizon.mp3")
    player.play("mp4", "alone.mp4")
    player.play("vlc", "far far away.vlc")
    player.play("avi", "mind me.avi")
