"""Reload modunda uvicorn'un import ettiği ASGI giriş noktası: ``postdeck.asgi:app``."""

from postdeck.bootstrap import PostDeckBootstrap

bootstrap = PostDeckBootstrap()
bootstrap.initialize()
app = bootstrap.create_app()
