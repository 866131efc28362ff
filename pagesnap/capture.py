import asyncio
from typing import Callable, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright
from pyppeteer import launch
from pyppeteer.errors import PyppeteerError
from pyppeteer.errors import TimeoutError as PyppeteerTimeoutError

from pagesnap.config import Config, Engine
from pagesnap.console import console
from pagesnap.errors import CaptureError
from pagesnap.models import CaptureRequest, CaptureResult

CLIENT_SIZE_JS = """() => {
    return {
        width: document.documentElement.clientWidth,
        height: document.documentElement.clientHeight
    };
}"""


async def take_screenshot(request: CaptureRequest, config: Config) -> CaptureResult:
    """Take a screenshot of a webpage with pyppeteer"""
    try:
        browser = await launch(args=config.browser_args, headless=config.headless)
    except (PyppeteerError, OSError) as e:
        raise CaptureError(request.url, f"could not launch browser: {e}") from e

    try:
        page = await browser.newPage()

        if not request.full_page:
            await page.setViewport(request.viewport)

        console.log(f"navigating to {request.url}")
        await page.goto(request.url)

        width, height = request.width, request.height
        if request.full_page:
            dimensions = await page.evaluate(CLIENT_SIZE_JS)
            width, height = dimensions["width"], dimensions["height"]

        image = await page.screenshot({"fullPage": request.full_page, "type": "png"})
        await page.close()
    except (PyppeteerError, PyppeteerTimeoutError) as e:
        raise CaptureError(request.url, str(e)) from e
    finally:
        await browser.close()

    return CaptureResult(image=image, width=width, height=height)


def take_screenshot_playwright(
    request: CaptureRequest, config: Config
) -> CaptureResult:
    """Capture the same way as take_screenshot, using playwright's chromium."""
    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(
                headless=config.headless, args=config.browser_args
            )
            try:
                if request.full_page:
                    page = browser.new_page()
                else:
                    page = browser.new_page(
                        viewport={"width": request.width, "height": request.height},
                        device_scale_factor=1,
                    )

                console.log(f"navigating to {request.url}")
                page.goto(request.url)

                width, height = request.width, request.height
                if request.full_page:
                    dimensions = page.evaluate(CLIENT_SIZE_JS)
                    width, height = dimensions["width"], dimensions["height"]

                image = page.screenshot(full_page=request.full_page, type="png")
                page.close()
            finally:
                browser.close()
    except PlaywrightError as e:
        raise CaptureError(request.url, str(e)) from e

    return CaptureResult(image=image, width=width, height=height)


def _run_pyppeteer(request: CaptureRequest, config: Config) -> CaptureResult:
    return asyncio.run(take_screenshot(request, config))


ENGINES: dict[Engine, Callable[[CaptureRequest, Config], CaptureResult]] = {
    Engine.pyppeteer: _run_pyppeteer,
    Engine.playwright: take_screenshot_playwright,
}


def capture(
    request: CaptureRequest, config: Config, engine: Optional[Engine] = None
) -> CaptureResult:
    """Render `request` in a headless browser and return the png bytes.

    Args:
        request: what to capture.
        config: browser settings, and the engine to use unless `engine` is given.
        engine: overrides `config.engine`.

    Raises:
        CaptureError: the browser could not be launched or the page could not
            be loaded or rendered.
    """
    engine = Engine(engine or config.engine)
    console.log(
        f"capturing {request.url} with {engine.value}",
        "fullpage" if request.full_page else f"{request.width}x{request.height}",
    )
    result = ENGINES[engine](request, config)
    console.log(f"captured {result.width}x{result.height}, {len(result.image)} bytes")
    return result
