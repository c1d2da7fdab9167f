from .settings import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config

__all__ = ["Config", "DevelopmentConfig", "ProductionConfig", "TestingConfig", "config"]
