"""FastAPI application entrypoint."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from newsbrief.api.routes import router
from newsbrief.config import SOURCE_BASE_URL, SOURCE_DOMAIN, Settings
from newsbrief.services.summarizer import ArticleSummarizer

logger = logging.getLogger(__name__)

INDEX_HTML = """
<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Summarize CNBC Indonesia news with AI</title>
    <style>
      :root {
        color-scheme: dark;
        font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
        --color-brand: #005594;
        background: #000;
        color: #f5f5f5;
      }

      main {
        max-width: 960px;
        margin: 0 auto;
        padding: 64px 16px;
        display: flex;
        flex-direction: column;
        gap: 28px;
      }

      h1, h2 {
        text-align: center;
        margin: 0;
      }

      .lead {
        text-align: center;
        color: #9ca3af;
        font-size: 1.25rem;
      }

      .lead span {
        color: var(--color-brand);
      }

      input {
        padding: 12px;
        border-radius: 12px;
        border: 1px solid #6b7280;
        background: #000;
        color: inherit;
        font-size: 1rem;
      }

      button {
        border: none;
        border-radius: 16px;
        padding: 14px 22px;
        font-size: 1.1rem;
        font-weight: 600;
        background: var(--color-brand);
        color: white;
        cursor: pointer;
      }

      button:disabled {
        opacity: 0.6;
        cursor: wait;
      }

      .toast {
        position: fixed;
        top: 16px;
        left: 50%;
        transform: translateX(-50%);
        background: #b91c1c;
        padding: 10px 18px;
        border-radius: 10px;
        display: none;
      }

      .summary {
        border-top: 1px solid #4b5563;
        padding-top: 32px;
        line-height: 1.75;
        font-size: 1.1rem;
      }

      .summary li {
        margin-bottom: 8px;
      }
    </style>
  </head>
  <body>
    <div class="toast" id="toast"></div>
    <main>
      <h1>Summarize CNBC Indonesia news with AI</h1>
      <p class="lead">Copy and paste any <span>news</span> article link below.</p>
      <input
        id="article"
        type="text"
        placeholder="ex: __SOURCE_BASE_URL__tech/20210901160000-37-273436/whatsapp-bakal-kenalkan-fitur-pesan-hilang"
      />
      <button id="summarize" type="button">Summarize</button>
      <section class="summary" id="summary-panel" hidden>
        <h2>Summary</h2>
        <ul id="bullets"></ul>
      </section>
    </main>
    <script>
      const SOURCE_DOMAIN = "__SOURCE_DOMAIN__";
      const SOURCE_BASE_URL = "__SOURCE_BASE_URL__";
      const input = document.getElementById("article");
      const button = document.getElementById("summarize");
      const panel = document.getElementById("summary-panel");
      const bullets = document.getElementById("bullets");
      const toast = document.getElementById("toast");
      let controller = null;

      function notify(message) {
        toast.textContent = message;
        toast.style.display = "block";
        setTimeout(() => { toast.style.display = "none"; }, 2000);
      }

      function setLoading(loading) {
        button.disabled = loading;
        button.textContent = loading ? "Loading..." : "Summarize";
      }

      function render(summary) {
        panel.hidden = summary.length === 0;
        bullets.replaceChildren();
        for (const sentence of summary.split(". ")) {
          if (sentence.length === 0) continue;
          const item = document.createElement("li");
          item.textContent = sentence;
          bullets.appendChild(item);
        }
      }

      function articlePath(url) {
        try {
          return new URL(url).pathname;
        } catch (error) {
          return "/";
        }
      }

      async function generateSummary(url) {
        const candidate = url || input.value;
        if (!candidate.includes(SOURCE_DOMAIN)) {
          notify("Please enter a valid CNBC Indonesia article");
          return;
        }
        render("");
        input.value = candidate;
        if (controller) controller.abort();
        controller = new AbortController();
        const signal = controller.signal;
        setLoading(true);
        let summary = "";
        try {
          const response = await fetch("/api/summarize", {
            method: "POST",
            headers: { "Content-Type": "application/json" },
            body: JSON.stringify({ url: candidate }),
            signal,
          });
          if (!response.ok || !response.body) {
            console.log("error", response.statusText);
            return;
          }
          const reader = response.body.getReader();
          const decoder = new TextDecoder();
          while (true) {
            const { value, done } = await reader.read();
            if (done) break;
            summary += decoder.decode(value, { stream: true });
            render(summary);
          }
          summary += decoder.decode();
          render(summary);
          history.replaceState(null, "", articlePath(candidate));
        } catch (error) {
          if (error.name !== "AbortError") console.log("error", error);
        } finally {
          if (!signal.aborted) setLoading(false);
        }
      }

      button.addEventListener("click", () => generateSummary());
      input.addEventListener("keydown", (event) => {
        if (event.key === "Enter") generateSummary();
      });

      const segments = location.pathname.split("/").filter(Boolean);
      if (segments.length > 0 && !input.value) {
        generateSummary(SOURCE_BASE_URL + segments.join("/"));
      }
    </script>
  </body>
</html>
""".replace("__SOURCE_DOMAIN__", SOURCE_DOMAIN).replace("__SOURCE_BASE_URL__", SOURCE_BASE_URL)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Without explicit ``settings`` the environment is read here, so a missing
    provider credential stops the process before it serves anything.
    """

    settings = settings or Settings.from_env()

    app = FastAPI(title="newsbrief", description="Streaming CNBC Indonesia article summaries")
    app.state.settings = settings
    app.state.summarizer = ArticleSummarizer.from_settings(settings)
    app.include_router(router, prefix="/api")

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return INDEX_HTML

    @app.get("/{slug:path}", response_class=HTMLResponse)
    async def article_page(slug: str) -> str:
        return INDEX_HTML

    logger.info("newsbrief ready (model %s)", settings.completion.model)
    return app


app = create_app()
