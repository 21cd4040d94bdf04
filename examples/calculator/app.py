"""Calculator site — a home page, a calculator page, and a 404 page.

Pages are kida templates under ``site/``; ``style.css`` and ``script.js``
are served as static assets.

Run:
    python app.py
"""

from pathlib import Path

from waypost import Site, SiteConfig

site = Site(SiteConfig(root_dir=Path(__file__).parent / "site"))


if __name__ == "__main__":
    site.run()
