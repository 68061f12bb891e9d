import pygame
import pytest

from audio_manager import CUE_TONES, AudioManager, ToneSpec, oscillator, synthesize
from session import Cue


@pytest.mark.parametrize("wave", ["sine", "square", "sawtooth", "triangle"])
def test_oscillator_range(wave):
    values = [oscillator(wave, i / 64) for i in range(128)]
    assert all(-1.0 <= v <= 1.0 for v in values)
    assert max(values) > 0.9 and min(values) < -0.9


def test_unknown_waveform():
    with pytest.raises(ValueError):
        oscillator("noise", 0.1)


def test_every_cue_has_a_tone():
    assert set(CUE_TONES) == set(Cue)


@pytest.mark.parametrize("cue", list(Cue))
def test_synthesized_length_and_range(cue):
    spec = CUE_TONES[cue]
    samples = synthesize(spec, 8000)
    assert len(samples) == int(8000 * spec.duration)
    assert all(-32767 <= s <= 32767 for s in samples)
    assert max(abs(s) for s in samples) <= spec.gain * 32767 + 1


def test_lose_fades_to_silence():
    samples = synthesize(CUE_TONES[Cue.LOSE], 8000)
    assert max(abs(s) for s in samples[-40:]) < 50


def test_square_steps_change_pitch():
    spec = ToneSpec("square", 0.2, 100.0, steps=((0.1, 400.0),))
    samples = synthesize(spec, 8000)

    def sign_changes(chunk):
        return sum(1 for a, b in zip(chunk, chunk[1:]) if (a > 0) != (b > 0))

    assert sign_changes(samples[800:]) > 2 * sign_changes(samples[:800])


class _BrokenSound:
    def play(self):
        raise pygame.error("device lost")


class _CountingSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


@pytest.fixture
def audio():
    manager = AudioManager()
    yield manager
    manager.close()


def test_playback_errors_are_swallowed(audio):
    audio.sounds = {Cue.MOVE: _BrokenSound()}
    audio.play(Cue.MOVE)
    audio(Cue.MOVE)


def test_missing_cue_is_silent(audio):
    audio.sounds = {}
    audio.play(Cue.WIN)


def test_toggle_mutes(audio):
    sound = _CountingSound()
    audio.sounds = {Cue.START: sound}
    audio(Cue.START)
    assert audio.toggle_sound() is False
    audio(Cue.START)
    assert audio.toggle_sound() is True
    audio(Cue.START)
    assert sound.plays == 2
