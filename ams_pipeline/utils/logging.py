import logging

def setup_logging(level: str = "INFO"):
    """Configure root logging for the archive pipeline"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
