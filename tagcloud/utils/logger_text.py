# tagcloud/utils/logger_text.py
from datetime import datetime

class Log:
    """
    Genera líneas HTML para la consola del host.
    Los widgets las emiten por su `log_signal`; nunca se imprimen desde la librería.
    """
    COLORS = {
        "INFO": "#29b6f6",
        "WARNING": "#ffa726",
        "DEBUG": "#bdbdbd",
        "LAYOUT": "#ab47bc"
    }
    SOURCE = "TagCloud"

    @staticmethod
    def _format(level, message):
        color = Log.COLORS.get(level, "#ffffff")
        timestamp = datetime.now().strftime("%H:%M:%S")

        return (
            f'<span style="color:#555;">{timestamp}</span> '
            f'<span style="color:{color}; font-weight:bold;">[{level}]</span> '
            f'<span style="color:#888;">{Log.SOURCE}:</span> '
            f'<span style="color:#ddd;">{message}</span>'
        )

    @staticmethod
    def info(msg): return Log._format("INFO", msg)

    @staticmethod
    def warning(msg): return Log._format("WARNING", msg)

    @staticmethod
    def debug(msg): return Log._format("DEBUG", msg)

    @staticmethod
    def layout(msg): return Log._format("LAYOUT", msg)
