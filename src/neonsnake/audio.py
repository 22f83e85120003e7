"""Sound cue synthesis and playback."""

from __future__ import annotations

from array import array
from dataclasses import dataclass
from pathlib import Path
import logging
import math
import pygame

from .session import GameEvent

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
MIN_GAIN = 0.01


@dataclass(frozen=True, slots=True)
class Tone:
    """A single oscillator sweep with a gain envelope."""

    waveform: str
    start_hz: float
    end_hz: float
    duration: float
    start_gain: float
    end_gain: float = MIN_GAIN
    sweep: float | None = None
    exponential: bool = False


CUES: dict[str, Tone] = {
    "ate": Tone("sine", 600, 1200, 0.1, 0.5, exponential=True),
    "died": Tone("sawtooth", 200, 50, 0.3, 0.5),
    "powerup": Tone("square", 400, 1200, 0.5, 0.3, sweep=0.2),
    "click": Tone("sine", 880, 880, 0.05, 0.25),
}

EVENT_CUES = {
    GameEvent.ATE: "ate",
    GameEvent.DIED: "died",
    GameEvent.POWER_UP: "powerup",
    GameEvent.UI_CLICK: "click",
}


def _ramp(start: float, end: float, fraction: float, exponential: bool) -> float:
    if exponential:
        return start * (end / start) ** fraction
    return start + (end - start) * fraction


def _oscillator(waveform: str, phase: float) -> float:
    if waveform == "square":
        return 1.0 if math.sin(phase) >= 0 else -1.0
    if waveform == "sawtooth":
        return 2.0 * ((phase / math.tau) % 1.0) - 1.0
    return math.sin(phase)


def render_tone(tone: Tone, sample_rate: int = SAMPLE_RATE) -> list[float]:
    """Render a tone to mono float samples in [-1, 1]."""
    count = max(1, int(tone.duration * sample_rate))
    sweep = tone.sweep if tone.sweep is not None else tone.duration
    samples: list[float] = []
    phase = 0.0
    for index in range(count):
        t = index / sample_rate
        freq = _ramp(tone.start_hz, tone.end_hz, min(1.0, t / sweep), tone.exponential)
        gain = _ramp(tone.start_gain, tone.end_gain, t / tone.duration, tone.exponential)
        samples.append(_oscillator(tone.waveform, phase) * gain)
        phase += math.tau * freq / sample_rate
    return samples


class AudioManager:
    """Plays cue sounds, falling back to silence when the mixer is unavailable.

    A ``<cue>.wav`` under ``assets/sounds`` overrides the synthesized version.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self.sound_enabled = False
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            self.sound_enabled = True
        except pygame.error:
            logger.info("Audio disabled: mixer could not be initialised")
            self.sound_enabled = False

    def load_assets(self) -> None:
        """Load or synthesize every cue."""
        if not self.sound_enabled:
            return
        for key, tone in CUES.items():
            path = self.root / "assets" / "sounds" / f"{key}.wav"
            try:
                if path.exists():
                    self.sounds[key] = pygame.mixer.Sound(str(path))
                else:
                    self.sounds[key] = self._synthesize(tone)
            except pygame.error:
                logger.warning("Could not load sound cue %s", key, exc_info=True)

    def _synthesize(self, tone: Tone) -> pygame.mixer.Sound:
        init = pygame.mixer.get_init()
        frequency, channels = (init[0], init[2]) if init else (SAMPLE_RATE, 1)
        pcm = array("h")
        for sample in render_tone(tone, frequency):
            value = int(max(-1.0, min(1.0, sample)) * 32767)
            pcm.extend([value] * channels)
        return pygame.mixer.Sound(buffer=pcm.tobytes())

    def set_volumes(self, master: float, sfx: float) -> None:
        """Apply current volume settings."""
        if not self.sound_enabled:
            return
        for sound in self.sounds.values():
            sound.set_volume(master * sfx)

    def play(self, key: str) -> None:
        """Play a named sound effect."""
        if not self.sound_enabled:
            return
        sound = self.sounds.get(key)
        if sound:
            sound.play()

    def handle_event(self, event: GameEvent) -> None:
        cue = EVENT_CUES.get(event)
        if cue is not None:
            self.play(cue)
