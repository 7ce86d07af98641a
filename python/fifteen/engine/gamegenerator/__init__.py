from fifteen.engine.gamegenerator.generator import GameGenerator

__all__ = ["GameGenerator"]
