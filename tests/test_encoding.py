import os
import tempfile
import unittest

from demo_movie.core import MovieConfig, PreconditionError, resolve_artifacts
from demo_movie.core.paths import raw_root
from demo_movie.encoding import (
    DirectArgsEncoder,
    Encoder,
    JobFileEncoder,
    build_ffmpeg_args,
    build_job_script,
    ffmpeg_command_line,
    select_encoder,
)


def make_config(base="/tmp/x", **overrides):
    values = dict(
        demo_path=os.path.join(base, "match.dem"),
        game_dir=os.path.join(base, "game"),
        raw_files_destination=os.path.join(base, "raw"),
        output_destination=os.path.join(base, "out"),
        output_filename="movie",
        start_tick=1000,
        end_tick=2000,
        frame_rate=60,
        video_codec="libx264",
        video_quality=18,
        audio_codec="aac",
        audio_bitrate=192,
    )
    values.update(overrides)
    return MovieConfig(**values)


def touch(path):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(b"\0")


class FFmpegArgsTests(unittest.TestCase):
    def test_fixed_order(self):
        args = build_ffmpeg_args(make_config(), "/raw/take/defaultNormal", "/raw/take/audio_1.wav", "/out/movie.mp4")
        self.assertEqual(
            args,
            [
                "-y",
                "-f", "image2",
                "-framerate", "60",
                "-i", os.path.join("/raw/take/defaultNormal", "%05d.tga"),
                "-i", "/raw/take/audio_1.wav",
                "-vcodec", "libx264",
                "-qp", "18",
                "-acodec", "aac",
                "-b:a", "192K",
                "/out/movie.mp4",
            ],
        )

    def test_passthrough_parameters(self):
        cfg = make_config(ffmpeg_input_parameters="-start_number 0", ffmpeg_extra_parameters="-pix_fmt yuv420p -threads 4")
        args = build_ffmpeg_args(cfg, "/f", "/a.wav", "/o.mp4")
        self.assertEqual(args[:7], ["-y", "-f", "image2", "-framerate", "60", "-start_number", "0"])
        self.assertEqual(args[7], "-i")
        self.assertEqual(args[-5:], ["-pix_fmt", "yuv420p", "-threads", "4", "/o.mp4"])
        self.assertEqual(args[-7:-5], ["-b:a", "192K"])

    def test_command_line(self):
        line = ffmpeg_command_line("ffmpeg", ["-i", "/my dir/a.wav", "out.mp4"])
        self.assertEqual(line, "ffmpeg -i '/my dir/a.wav' out.mp4")


class JobScriptTests(unittest.TestCase):
    def test_substitutions_are_escaped(self):
        text = build_job_script("C:\\raw\\00000.tga", "C:\\raw\\audio_1.wav", 60, 321, "D:\\out\\movie.avi")
        self.assertIn('VirtualDub.Open(U"C:\\\\raw\\\\00000.tga",0,0);', text)
        self.assertIn('U"C:\\\\raw\\\\audio_1.wav"', text)
        self.assertIn("SetFrameRate2(60,1,1);", text)
        self.assertIn("AddRange(0,321);", text)
        self.assertIn('VirtualDub.SaveAVI(U"D:\\\\out\\\\movie.avi");', text)


class JobFileEncoderTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.base = self.tmp.name
        self.vd_dir = os.path.join(self.base, "vdub")
        self.cfg = make_config(
            self.base,
            use_virtualdub=True,
            virtualdub_dir=self.vd_dir,
            virtualdub_exe_path=os.path.join(self.vd_dir, "Veedub64.exe"),
        )
        self.take = os.path.join(raw_root(self.cfg), "take0000")
        self.frames_dir = os.path.join(self.take, "defaultNormal")

    def tearDown(self):
        self.tmp.cleanup()

    def build(self):
        return JobFileEncoder().build_job(self.cfg, resolve_artifacts(self.cfg))

    def assert_precondition(self, fragment):
        with self.assertRaises(PreconditionError) as ctx:
            self.build()
        self.assertIn(fragment, str(ctx.exception))

    def test_missing_frame_directory(self):
        os.makedirs(self.take)
        self.assert_precondition("Directory containing TGA files")

    def test_no_frames(self):
        os.makedirs(self.frames_dir)
        self.assert_precondition("No TGA files")

    def test_missing_output_directory(self):
        touch(os.path.join(self.frames_dir, "00000.tga"))
        self.assert_precondition("Output directory")

    def test_missing_first_frame(self):
        touch(os.path.join(self.frames_dir, "00001.tga"))
        os.makedirs(self.cfg.output_destination)
        self.assert_precondition("00000.tga")

    def test_missing_audio(self):
        touch(os.path.join(self.frames_dir, "00000.tga"))
        os.makedirs(self.cfg.output_destination)
        self.assert_precondition("WAV")

    def test_missing_virtualdub_directory(self):
        touch(os.path.join(self.frames_dir, "00000.tga"))
        touch(os.path.join(self.take, "audio_1.wav"))
        os.makedirs(self.cfg.output_destination)
        self.assert_precondition("VirtualDub directory")

    def test_writes_job_file(self):
        for i in range(3):
            touch(os.path.join(self.frames_dir, f"{i:05d}.tga"))
        touch(os.path.join(self.take, "audio_1.wav"))
        os.makedirs(self.cfg.output_destination)
        os.makedirs(self.vd_dir)

        job = self.build()

        self.assertEqual(job.executable, self.cfg.virtualdub_exe_path)
        self.assertEqual(job.args, ["/s", "demo_movie.jobs", "/x"])
        self.assertEqual(job.cwd, self.vd_dir)
        with open(os.path.join(self.vd_dir, "demo_movie.jobs"), encoding="utf-8") as f:
            text = f.read()
        self.assertIn("AddRange(0,3);", text)
        self.assertIn(os.path.join(self.frames_dir, "00000.tga").replace("\\", "\\\\"), text)
        self.assertIn(os.path.join(self.cfg.output_destination, "movie.avi"), text)


class DirectArgsEncoderTests(unittest.TestCase):
    def test_builds_ffmpeg_job(self):
        with tempfile.TemporaryDirectory() as base:
            cfg = make_config(base, ffmpeg_exe_path="/usr/bin/ffmpeg")
            take = os.path.join(raw_root(cfg), "take0000")
            touch(os.path.join(take, "defaultNormal", "00000.tga"))
            touch(os.path.join(take, "audio_1.wav"))

            job = DirectArgsEncoder().build_job(cfg, resolve_artifacts(cfg))

        self.assertEqual(job.executable, "/usr/bin/ffmpeg")
        self.assertIsNone(job.cwd)
        self.assertEqual(job.args[-1], os.path.join(base, "out", "movie.mp4"))
        self.assertIn(os.path.join(take, "audio_1.wav"), job.args)

    def test_missing_audio(self):
        with tempfile.TemporaryDirectory() as base:
            cfg = make_config(base)
            touch(os.path.join(raw_root(cfg), "take0000", "defaultNormal", "00000.tga"))
            with self.assertRaises(PreconditionError):
                DirectArgsEncoder().build_job(cfg, resolve_artifacts(cfg))


class SelectEncoderTests(unittest.TestCase):
    def test_selection(self):
        self.assertIsInstance(select_encoder(make_config()), DirectArgsEncoder)
        self.assertIsInstance(select_encoder(make_config(use_virtualdub=True)), JobFileEncoder)

    def test_encoder_requires_build_job(self):
        class Incomplete(Encoder):
            name = "incomplete"

        with self.assertRaises(TypeError):
            Encoder()
        with self.assertRaises(TypeError):
            Incomplete()


if __name__ == "__main__":
    unittest.main()
