import subprocess
import sys
from loguru import logger


def setup_logging(log_lvl="INFO", options={}):
    file = options.get("file", False)
    function = options.get("function", False)

    log_fmt = (u"<n><d><level>{time:HH:mm:ss.SSS} | " + f"{'{file:>15.15}' if file else ''}" + f"{'{function:>15.15}' if function else ''}" + f"{':{line:<4} | ' if file or function else ''}"
               + u"{level:1.1} | </level></d></n><level>{message}</level>")

    # stdout is reserved for the changelog itself
    logger.configure(
        handlers=[{
            "sink": sys.stderr,
            "level": log_lvl,
            "format": log_fmt,
            "colorize": True,
            "backtrace": True,
            "diagnose": True
        }],
        levels=[
            {"name": "TRACE", "color": "<white><dim>"},
            {"name": "DEBUG", "color": "<cyan><dim>"},
            {"name": "INFO", "color": "<white>"}
        ]
    )  # type: ignore # yapf: disable


def run(cmd):
    try:
        logger.debug(f"Running command: {cmd}")
        result = subprocess.run(
            cmd,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE)
    except Exception as e:
        logger.error(f"Failed to run command: {cmd}")
        return subprocess.CompletedProcess(args=cmd, returncode=1, stdout=b'', stderr=str(e).encode())
    return result
