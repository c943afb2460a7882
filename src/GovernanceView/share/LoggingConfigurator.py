import logging
import os


class LoggingConfigurator:
    """
    一个用于集中配置项目日志记录器的类。
    """

    def __init__(self, rootLogLevel: str = "INFO"):
        """
        初始化配置器。
        :param rootLogLevel: 从 .env 文件读取的根日志级别字符串。
        """
        self.logLevel = getattr(logging, rootLogLevel.upper(), logging.INFO)
        self.formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(name)s: %(message)s")
        self.streamHandler = logging.StreamHandler()
        self.streamHandler.setFormatter(self.formatter)

    def configure(self):
        """
        应用所有日志配置。
        """
        self._configureRootLogger()
        self._configureAiohttpLogger()
        logging.getLogger("governance_view").debug("日志记录器配置完成。")

    def _configureRootLogger(self):
        """配置项目的包级别 logger，模块 logger 均挂在它下面。"""
        for name in ("governance_view", "GovernanceView"):
            logger = logging.getLogger(name)
            logger.setLevel(self.logLevel)
            if not logger.handlers:
                logger.addHandler(self.streamHandler)
            logger.propagate = False

    def _configureAiohttpLogger(self):
        """配置 aiohttp 的日志记录器。"""
        # 从环境变量获取 aiohttp 的日志级别，默认为 WARNING
        log_level_str = os.getenv("AIOHTTP_LOG_LEVEL", "WARNING").upper()
        log_level = getattr(logging, log_level_str, logging.WARNING)

        aiohttp_logger = logging.getLogger("aiohttp")
        aiohttp_logger.setLevel(log_level)
        if not aiohttp_logger.handlers:
            aiohttp_logger.addHandler(self.streamHandler)
        aiohttp_logger.propagate = False
