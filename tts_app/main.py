from __future__ import annotations

import sys

from tts_app.application.errors import LoadError, PlaybackError, SynthesisError
from tts_app.config import AppConfig
from tts_app.di_container import AppContainer, build_container
from tts_app.utils.args import parse_args
from tts_app.utils.env import load_dotenv
from tts_app.utils.logger import Logger

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CONFIG = 2
EXIT_LOAD = 3
EXIT_SYNTHESIS = 4
EXIT_PLAYBACK = 5


def _print_stderr(line: str) -> None:
    print(line, file=sys.stderr)


def _inspect(container: AppContainer) -> int:
    session = container.loader.load_bundled()

    print(f"model:   {container.config.model.path}")
    print(f"inputs:  {', '.join(session.input_names)}")
    print(f"outputs: {', '.join(session.output_names)}")
    return EXIT_OK


def _say(container: AppContainer, text: str) -> int:
    if not text:
        print("Please enter some text.", file=sys.stderr)
        return EXIT_USAGE

    service = container.tts_service
    service.load_bundled_model()
    samples = service.speak(text)

    duration = samples / container.config.audio.sample_rate
    container.logger.info(f"Speaking {samples} samples ({duration:.2f}s)")
    container.speaker.wait()
    return EXIT_OK


def _run_gui(container: AppContainer) -> int:
    from PySide6.QtWidgets import QApplication

    from tts_app.presentation.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv[:1])
    window = MainWindow(container.tts_service, container.logger)
    window.show()
    window.load_bundled_model()
    return app.exec()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    load_dotenv(args.env_file)

    try:
        config = AppConfig.from_env()
    except ValueError as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    if args.model:
        config = config.with_model_path(args.model)

    headless = args.say is not None or args.inspect
    logger = Logger(log_dir=config.log_dir, on_emit=_print_stderr if headless else None)
    container: AppContainer | None = None

    try:
        container = build_container(config, logger=logger)
        if args.inspect:
            return _inspect(container)
        if args.say is not None:
            return _say(container, args.say)
        return _run_gui(container)
    except LoadError as exc:
        print(f"Error loading model: {exc}", file=sys.stderr)
        return EXIT_LOAD
    except SynthesisError as exc:
        print(f"Error during synthesis: {exc}", file=sys.stderr)
        return EXIT_SYNTHESIS
    except PlaybackError as exc:
        print(f"Audio playback error: {exc}", file=sys.stderr)
        return EXIT_PLAYBACK
    finally:
        if container is not None:
            container.tts_service.close()
        logger.save()


if __name__ == "__main__":
    raise SystemExit(main())
