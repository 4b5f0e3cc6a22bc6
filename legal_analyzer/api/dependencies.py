from fastapi import Request

from legal_analyzer.config.settings import Settings
from legal_analyzer.processor.processor import Processor
from legal_analyzer.translation.translator import Translator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_processor(request: Request) -> Processor:
    return request.app.state.processor


def get_translator(request: Request) -> Translator:
    return request.app.state.translator
