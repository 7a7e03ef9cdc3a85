import unittest
import music21
from keyscales.keyed_scale import (
    KeyedScale,
    keyed_scale,
    keyed_scales_for_tonic,
    generate_keyed_scales,
)
from keyscales.tones import degree_to_tone

MAJOR = degree_to_tone("1 2 3 4 5 6 7")


def _pitch_class(name):
    # music21 spells flats with '-'
    return music21.pitch.Pitch(name.replace("b", "-")).pitchClass


class TestKeyedScale(unittest.TestCase):
    def test_c_major(self):
        out = keyed_scales_for_tonic("Major", MAJOR, 0)
        self.assertEqual(len(out), 1)
        ks = out[0]
        self.assertEqual(ks.tonic, "C")
        self.assertEqual(ks.notes, ("C", "D", "E", "F", "G", "A", "B"))
        self.assertFalse(ks.has_sharps)
        self.assertFalse(ks.has_flats)

    def test_c_sharp_major_and_twin(self):
        sharp, flat = keyed_scales_for_tonic("Major", MAJOR, 1)
        self.assertEqual(sharp.tonic, "C#")
        self.assertEqual(sharp.notes, ("C#", "D#", "F", "F#", "G#", "A#", "C"))
        self.assertTrue(sharp.has_sharps)
        self.assertFalse(sharp.has_flats)

        self.assertEqual(flat.scale, "Major")
        self.assertEqual(flat.tonic, "Db")
        self.assertEqual(flat.notes, ("Db", "Eb", "F", "Gb", "Ab", "Bb", "C"))
        self.assertFalse(flat.has_sharps)
        self.assertTrue(flat.has_flats)

    def test_flat_copy_same_pitches(self):
        for position in range(12):
            ks = keyed_scale("Major", MAJOR, position)
            twin = ks.flat_copy()
            self.assertEqual([_pitch_class(n) for n in ks.notes],
                             [_pitch_class(n) for n in twin.notes])
            self.assertEqual(_pitch_class(ks.tonic), _pitch_class(twin.tonic))

    def test_tonic_is_first_note(self):
        for position in range(12):
            ks = keyed_scale("Major", MAJOR, position)
            self.assertEqual(ks.notes[0], ks.tonic)

    def test_single_spelling_per_instance(self):
        for ks in generate_keyed_scales({"Major": MAJOR}):
            self.assertFalse(ks.has_sharps and ks.has_flats)

    def test_immutable(self):
        ks = KeyedScale("Major", "C", ("C",))
        with self.assertRaises(AttributeError):
            ks.tonic = "D"


class TestGenerate(unittest.TestCase):
    def setUp(self):
        self.scale_tones = {
            "Major": MAJOR,
            "Blues": degree_to_tone("1 b3 4 #4 5 b7"),
        }

    def test_order(self):
        out = list(generate_keyed_scales(self.scale_tones))
        self.assertEqual(out[0].scale, "Blues")
        self.assertEqual(out[-1].scale, "Major")
        # C major has no twin, C# major's twin follows it
        major = [ks for ks in out if ks.scale == "Major"]
        self.assertEqual([ks.tonic for ks in major[:3]], ["C", "C#", "Db"])

    def test_major_twins(self):
        major = [ks for ks in generate_keyed_scales({"Major": MAJOR})]
        # Every key except C needs a sharp somewhere
        self.assertEqual(len(major), 23)

    def test_note_counts(self):
        for ks in generate_keyed_scales(self.scale_tones):
            self.assertEqual(ks.note_count, len(self.scale_tones[ks.scale]))

    def test_every_tonic_present(self):
        sharp_tonics = [ks.tonic for ks in generate_keyed_scales({"Major": MAJOR})
                        if not ks.has_flats]
        self.assertEqual(sharp_tonics, ["C", "C#", "D", "D#", "E", "F",
                                        "F#", "G", "G#", "A", "A#", "B"])


if __name__ == "__main__":
    unittest.main()
