"""VirtualDub job file generation."""
from __future__ import annotations

from ..core.paths import escape_path

__all__ = ["JOB_TEMPLATE", "build_job_script"]


# Sylia job script; paths must already be escaped for the script strings.
JOB_TEMPLATE = """\
// VirtualDub job list (Sylia script format)
// This is a program generated file -- edit at your own risk.
//
// $numjobs 1
//

// $job "Job 1"
// $input "{first_frame}"
// $output "{output}"
// $state 0
// $start_time 0 0
// $end_time 0 0
// $script

VirtualDub.Open(U"{first_frame}",0,0);
VirtualDub.audio.SetSource(U"{audio}", "", 0);
VirtualDub.audio.SetMode(0);
VirtualDub.audio.SetInterleave(1,500,1,0,0);
VirtualDub.audio.SetClipMode(1,1);
VirtualDub.audio.SetConversion(0,0,0,0,0);
VirtualDub.audio.SetVolume();
VirtualDub.audio.SetCompression();
VirtualDub.audio.EnableFilterGraph(0);
VirtualDub.video.SetInputFormat(0);
VirtualDub.video.SetOutputFormat(7);
VirtualDub.video.SetMode(3);
VirtualDub.video.SetSmartRendering(0);
VirtualDub.video.SetPreserveEmptyFrames(0);
VirtualDub.video.SetFrameRate2({frame_rate},1,1);
VirtualDub.video.SetIVTC(0, 0, 0, 0);
VirtualDub.video.SetCompression();
VirtualDub.video.filters.Clear();
VirtualDub.subset.Clear();
VirtualDub.subset.AddRange(0,{frame_count});
VirtualDub.project.ClearTextInfo();
VirtualDub.SaveAVI(U"{output}");
VirtualDub.audio.SetSource(1);
VirtualDub.Close();

// $endjob
//
//--------------------------------------------------
// $done
"""


def build_job_script(
    first_frame: str, audio: str, frame_rate: int, frame_count: int, output: str
) -> str:
    """Fill the job template, escaping every embedded path."""
    return JOB_TEMPLATE.format(
        first_frame=escape_path(first_frame),
        audio=escape_path(audio),
        frame_rate=frame_rate,
        frame_count=frame_count,
        output=escape_path(output),
    )
