# audio_manager.py - Audio Feedback System
"""
Plays the four feedback cues (move, win, lose, start) through pygame.mixer.
The cues are short synthesised tones built in memory at startup, so the
game ships no sound files.
"""

import logging
import math
from array import array
from dataclasses import dataclass

import pygame  # Audio library

from session import Cue

log = logging.getLogger(__name__)

SAMPLE_RATE = 44100
MAX_AMPLITUDE = 32767  # signed 16-bit


@dataclass(frozen=True)
class ToneSpec:
    """One oscillator note: waveform, pitch curve and volume envelope."""
    wave: str  # "sine", "square", "sawtooth" or "triangle"
    duration: float  # seconds
    freq: float  # starting pitch in Hz
    freq_end: float | None = None  # exponential glide target over the whole note
    steps: tuple[tuple[float, float], ...] = ()  # (time, pitch) jumps
    gain: float = 0.05
    gain_end: float = 0.001
    linear_fade: bool = False  # exponential fade otherwise


CUE_TONES: dict[Cue, ToneSpec] = {
    Cue.MOVE: ToneSpec("triangle", 0.1, 440.0, freq_end=110.0),
    Cue.WIN: ToneSpec("square", 0.3, 523.25, steps=((0.1, 659.25), (0.2, 783.99)),
                      gain=0.03),
    Cue.LOSE: ToneSpec("sawtooth", 0.5, 110.0, freq_end=40.0, gain_end=0.0,
                       linear_fade=True),
    Cue.START: ToneSpec("sine", 0.2, 880.0),
}


def oscillator(wave: str, phase: float) -> float:
    """Waveform value in [-1, 1] for a phase given in cycles."""
    p = phase % 1.0
    if wave == "sine":
        return math.sin(2 * math.pi * p)
    if wave == "square":
        return 1.0 if p < 0.5 else -1.0
    if wave == "sawtooth":
        return 2.0 * p - 1.0
    if wave == "triangle":
        return 1.0 - 4.0 * abs(p - 0.5)
    raise ValueError(f"unknown waveform: {wave}")


def _pitch_at(spec: ToneSpec, t: float) -> float:
    if spec.freq_end is not None:
        return spec.freq * (spec.freq_end / spec.freq) ** (t / spec.duration)
    freq = spec.freq
    for at, step_freq in spec.steps:
        if t >= at:
            freq = step_freq
    return freq


def _gain_at(spec: ToneSpec, t: float) -> float:
    k = t / spec.duration
    if spec.linear_fade or spec.gain_end <= 0:
        return spec.gain + (spec.gain_end - spec.gain) * k
    return spec.gain * (spec.gain_end / spec.gain) ** k


def synthesize(spec: ToneSpec, rate: int = SAMPLE_RATE) -> array:
    """Render a tone as mono signed 16-bit samples."""
    samples = array("h")
    phase = 0.0
    for i in range(int(rate * spec.duration)):
        t = i / rate
        value = oscillator(spec.wave, phase) * _gain_at(spec, t)
        samples.append(int(max(-1.0, min(1.0, value)) * MAX_AMPLITUDE))
        phase += _pitch_at(spec, t) / rate
    return samples


class AudioManager:
    """Feedback collaborator: call it with a ``Cue`` to play the matching tone."""

    def __init__(self, sound_enabled: bool = True) -> None:
        self.sound_enabled: bool = sound_enabled
        self.sounds: dict[Cue, pygame.mixer.Sound | None] = {}

        try:
            # 44.1kHz, 16-bit, mono, small buffer for short cues
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
        except pygame.error as exc:
            log.info("audio unavailable, running silent: %s", exc)
            return

        for cue, spec in CUE_TONES.items():
            self.sounds[cue] = self._build_sound(spec)

    def _build_sound(self, spec: ToneSpec):
        """Build a Sound for the mixer's actual format, None if impossible."""
        mixer_format = pygame.mixer.get_init()
        if mixer_format is None:
            return None
        rate, size, channels = mixer_format
        if size != -16:
            log.info("mixer sample size %s not supported, cue disabled", size)
            return None

        mono = synthesize(spec, rate)
        if channels > 1:  # same sample on every channel
            frames = array("h")
            for sample in mono:
                frames.extend([sample] * channels)
            mono = frames
        try:
            return pygame.mixer.Sound(buffer=mono.tobytes())
        except pygame.error:
            log.warning("could not build %s tone", spec.wave, exc_info=True)
            return None

    def play(self, cue: Cue) -> None:
        """Fire and forget; playback errors never reach the caller."""
        if not self.sound_enabled:
            return
        snd = self.sounds.get(cue)
        if snd is None:
            return
        try:
            snd.play()  # Non-blocking playback
        except pygame.error:
            log.debug("could not play %s cue", cue.value, exc_info=True)

    __call__ = play

    def toggle_sound(self) -> bool:
        """
        Toggle sound on/off globally.

        Returns:
            bool: True if sound is enabled after toggle, False if disabled.
        """
        self.sound_enabled = not self.sound_enabled
        if not self.sound_enabled and pygame.mixer.get_init():
            pygame.mixer.stop()  # cut any cue still playing
        return self.sound_enabled

    def close(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.quit()
