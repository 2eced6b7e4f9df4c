# main.py

import sys
from dataclasses import dataclass, field
from uuid import uuid4

from PyQt6.QtWidgets import QApplication, QMainWindow, QScrollArea, QVBoxLayout, QWidget

from tagcloud.components.tag_cloud import TagCloudView
from tagcloud.factories import create_badge, create_log_console, create_section_header
from tagcloud.theme import Dims, get_sheet
from tagcloud.utils.logger_text import Log

DEFAULT_TAGS = ["Hello", "World", "I", "love", "Python", "PyQt6", "flow", "layout", "tags", "cloud"]

@dataclass
class NumberTag:
    num: int
    id: str = field(default_factory=lambda: uuid4().hex)

class DemoWindow(QMainWindow):
    """
    Ventana de ejemplo: una nube en modo conveniencia y otra personalizada.
    Los logs de ambas se muestran en una consola.
    """
    def __init__(self, tags=None):
        super().__init__()
        self.setWindowTitle("TagCloud")
        self.resize(*Dims.demo["window"])

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(*Dims.demo["margins"])
        layout.setSpacing(Dims.demo["space"])

        self.console = create_log_console()

        # 1. Modo conveniencia
        self.tag_cloud = TagCloudView.from_tags(tags if tags is not None else DEFAULT_TAGS)

        # 2. Modo personalizado (identidad por id, no por valor)
        numbers = [NumberTag(n) for n in range(1, 6)]
        self.custom_cloud = TagCloudView(
            numbers,
            lambda tag: create_badge(tag.num),
            key=lambda tag: tag.id
        )

        for cloud in (self.tag_cloud, self.custom_cloud):
            for line in cloud.log_history:
                self.console.append(line)
            cloud.log_signal.connect(self.console.append)

        layout.addWidget(create_section_header("Tags"))
        layout.addWidget(self.tag_cloud)
        layout.addWidget(create_section_header("Custom"))
        layout.addWidget(self.custom_cloud)
        layout.addWidget(self.console, 1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

        self.console.append(Log.info("Demo lista."))

def main():
    app = QApplication(sys.argv)
    app.setStyleSheet(get_sheet())

    window = DemoWindow()
    window.show()

    sys.exit(app.exec())

if __name__ == "__main__":
    main()
