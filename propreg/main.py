import logging

from propreg.api.main import create_app
from propreg.core.properties import load_registries
from propreg.core.settings import Settings


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Built exactly once; everything downstream receives it explicitly.
    registries = load_registries(settings)
    app = create_app(registries)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
