from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from wwwjdic.engine import Engine
from wwwjdic import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
app.json.ensure_ascii = False
_engine: Engine | None = None


def attach_engine(engine: Engine | None) -> None:
    global _engine
    _engine = engine


# ---------- API ----------
@app.get("/api/sentences")
def api_sentences():
    word = request.args.get("word", "", type=str).strip()
    k = request.args.get("k", CFG.MAX_DETAILS, type=int)
    if not word:
        return jsonify({"error": "missing 'word'"}), 400
    if _engine is None or _engine.index is None:
        return jsonify({"error": "corpus not loaded"}), 503
    return jsonify(_engine.details(word, limit=k))


@app.get("/health")
def health():
    if _engine is None or _engine.index is None:
        return jsonify({"ok": False, "sentences": 0, "errors": 0}), 503
    index = _engine.index
    return jsonify({"ok": True, "sentences": index.sentence_count, "errors": len(index.errors)})


# ---------- UI ----------
@app.get("/")
def home():
    # One input, one list; everything comes from /api/sentences.
    html = r"""
<!doctype html>
<html lang="ja">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Example sentences</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.5 system-ui,sans-serif; }
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
       background:#0b1117; color:var(--ink); font-size:18px; box-sizing:border-box; }
.row{ padding:10px 0; border-bottom:1px solid var(--border); }
.en{ color:var(--muted); }
.meta{ color:var(--muted); font-size:13px; margin:10px 0; }
</style>
</head>
<body>
<div class="container"><div class="card">
  <form id="f"><input id="q" placeholder="Headword, e.g. 愛する" autofocus /></form>
  <div class="meta" id="stats">Ready.</div>
  <div id="out"></div>
</div></div>
<script>
const $ = (sel) => document.querySelector(sel);
const esc = (s) => String(s).replace(/[&<>"]/g, (c)=>({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c]));
$("#f").addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  const word = $("#q").value.trim();
  if(!word) return;
  const resp = await fetch(`/api/sentences?word=${encodeURIComponent(word)}`);
  const data = await resp.json();
  if(!resp.ok){ $("#stats").textContent = `Error: ${data.error}`; return; }
  $("#stats").textContent = `${data.total} sentence(s)`;
  $("#out").innerHTML = data.sentences.map((s)=>`
    <div class="row"><div>${esc(s.japanese_text)}</div><div class="en">${esc(s.english_text)}</div></div>`).join("");
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Serve example sentences for a dictionary details view")
    ap.add_argument("--corpus", default=None)
    ap.add_argument("--encoding", default=None)
    ap.add_argument("--mode", choices=["serial", "threads", "procs"], default=None)
    ap.add_argument("--workers", type=int, default=None)
    ap.add_argument("--strict", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    engine = Engine(verbose=args.verbose)
    engine.build(
        args.corpus, encoding=args.encoding, mode=args.mode, workers=args.workers,
        policy="strict" if args.strict else None,
    )
    attach_engine(engine)
    log.info("Serving %d headwords on %s:%d", len(engine.index), args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        attach_engine(None)
        engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
