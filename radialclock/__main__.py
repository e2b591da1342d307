"""Allow running RadialClock as a module: python -m radialclock."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import ClockApp


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("RadialClock")
    app.setOrganizationName("RadialClock")

    window = ClockApp()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
