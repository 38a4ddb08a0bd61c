import unittest
from unittest import mock

import psutil

from demo_movie.encoding import EncodeJob
from demo_movie.recording import process


class FakeProc:
    def __init__(self, name, pid, error=None):
        self.info = {"name": name}
        self.pid = pid
        self.error = error
        self.killed = False

    def kill(self):
        if self.error is not None:
            raise self.error
        self.killed = True


class KillProcessesTests(unittest.TestCase):
    def test_kills_known_names_only(self):
        procs = [
            FakeProc("csgo.exe", 1),
            FakeProc("HLAE.exe", 2),
            FakeProc("ffmpeg", 3),
            FakeProc("explorer.exe", 4),
            FakeProc("veedub64.EXE", 5),
            FakeProc(None, 6),
        ]
        with mock.patch("psutil.process_iter", return_value=procs):
            killed = process.kill_processes()

        self.assertEqual(killed, 4)
        self.assertEqual([p.pid for p in procs if p.killed], [1, 2, 3, 5])

    def test_exited_processes_are_ignored(self):
        procs = [
            FakeProc("csgo", 1, error=psutil.NoSuchProcess(1)),
            FakeProc("HLAE", 2, error=psutil.AccessDenied(2)),
            FakeProc("VirtualDub", 3),
        ]
        with mock.patch("psutil.process_iter", return_value=procs):
            killed = process.kill_processes()
        self.assertEqual(killed, 1)
        self.assertTrue(procs[2].killed)

    def test_nothing_running(self):
        with mock.patch("psutil.process_iter", return_value=[]):
            self.assertEqual(process.kill_processes(), 0)
            self.assertEqual(process.kill_processes(), 0)


class RunProcessTests(unittest.TestCase):
    def test_returns_exit_code(self):
        job = EncodeJob("/bin/vdub", ["/s", "demo_movie.jobs", "/x"], cwd="/vdub")
        with mock.patch("subprocess.Popen") as popen:
            popen.return_value.wait.return_value = 1
            code = process.run_process(job)

        self.assertEqual(code, 1)
        popen.assert_called_once_with(["/bin/vdub", "/s", "demo_movie.jobs", "/x"], cwd="/vdub")


class RevealTests(unittest.TestCase):
    def test_windows_selects_file(self):
        with mock.patch.object(process.sys, "platform", "win32"), mock.patch("subprocess.Popen") as popen:
            process.reveal_in_file_browser("movie.mp4")
        args = popen.call_args[0][0]
        self.assertEqual(args[0], "explorer.exe")
        self.assertTrue(args[1].startswith("/select,"))

    def test_linux_opens_folder(self):
        with mock.patch.object(process.sys, "platform", "linux"), mock.patch("subprocess.Popen") as popen:
            process.reveal_in_file_browser("/videos/movie.mp4")
        popen.assert_called_once_with(["xdg-open", "/videos"])


if __name__ == "__main__":
    unittest.main()
