# -*- coding: utf-8 -*-
"""
영상 생성 쓰레드.

- MovieService.start()는 게임/인코더가 종료될 때까지 블로킹되므로 QThread에서 실행합니다.
- 진행 상태와 오류는 시그널로만 GUI에 전달합니다.

Docstring 스타일: Google Style
"""
from __future__ import annotations

from typing import Optional

from PyQt5 import QtCore

from .service import MovieResult, MovieService


__all__ = ["MovieThread"]


class MovieThread(QtCore.QThread):
    """MovieService 실행용 QThread.

    Signals:
        sig_status(str): 진행 상태 메시지 (서비스 메시지 포함).
        sig_error(str): 실행 중 발생한 오류 메시지.
        sig_finished(str): 완료 시 출력 파일 경로 (실패 시 빈 문자열).
    """

    sig_status = QtCore.pyqtSignal(str)
    sig_error = QtCore.pyqtSignal(str)
    sig_finished = QtCore.pyqtSignal(str)

    def __init__(
        self, service: MovieService, parent: Optional[QtCore.QObject] = None
    ) -> None:
        super().__init__(parent)
        self.service = service
        self.result: Optional[MovieResult] = None
        self.service.sig_status.connect(self.sig_status.emit)

    # ------------------------------ Control ------------------------------ #
    def stop(self) -> None:
        """실행 중인 외부 프로세스를 모두 종료합니다."""
        self.service.cancel()

    # --------------------------------- Run -------------------------------- #
    def run(self) -> None:
        self.result = None
        try:
            self.sig_status.emit("Starting...")
            self.result = self.service.start()
        except Exception as exc:  # noqa: BLE001
            self.sig_status.emit(f"Error: {exc}")
            self.sig_error.emit(str(exc))
        finally:
            self.sig_finished.emit(self.result.output_path if self.result else "")
