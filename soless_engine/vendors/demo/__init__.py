""" Demo Vendor Package """

from .demo_gateway import DemoCompletionGateway, DEMO_MODE_MARKER, DEMO_REPLIES

__all__ = ['DemoCompletionGateway', 'DEMO_MODE_MARKER', 'DEMO_REPLIES']
