from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from wordgraph.engine import Engine
from wordgraph.normalize import normalize_word
from wordgraph.search import InvalidHopCount
from wordgraph import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None


def _get_engine() -> Engine:
    if _engine is None or not _engine.ready:
        raise RuntimeError("Engine not initialized. Start the server with --input.")
    return _engine


@app.errorhandler(RuntimeError)
def _not_ready(exc: RuntimeError):
    return jsonify({"ok": False, "error": str(exc)}), 503


# ---------- API ----------
@app.get("/api/health")
def api_health():
    eng = _engine
    ready = eng is not None and eng.ready
    body = {"ok": True, "ready": ready}
    if ready:
        body["nodes"] = len(eng.graph)
        body["edges"] = eng.graph.edge_count
    return jsonify(body)


@app.get("/api/path")
def api_path():
    src = normalize_word(request.args.get("src", "", type=str))
    dst = normalize_word(request.args.get("dst", "", type=str))
    if not src or not dst:
        return jsonify({"error": "both 'src' and 'dst' are required"}), 400
    res = _get_engine().shortest_path(src, dst)
    if res is None:
        return jsonify({"src": src, "dst": dst, "found": False})
    return jsonify({"src": src, "dst": dst, "found": True, **res.to_dict()})


@app.get("/api/hops")
def api_hops():
    src = normalize_word(request.args.get("src", "", type=str))
    raw = request.args.get("hops", str(CFG.DEFAULT_HOPS), type=str)
    try:
        hops = int(raw)
    except ValueError:
        return jsonify({"error": f"hops must be an integer, got {raw!r}"}), 400
    try:
        words = _get_engine().nodes_at_hops(src, hops)
    except InvalidHopCount as exc:
        return jsonify({"error": str(exc)}), 400
    return jsonify({"src": src, "hops": hops, "count": len(words), "words": words})


@app.get("/api/neighbors")
def api_neighbors():
    word = normalize_word(request.args.get("word", "", type=str))
    edges = _get_engine().neighbors(word)
    return jsonify({
        "word": word,
        "edges": [{"to": e.to, "count": e.count, "weight": e.weight} for e in edges],
    })


@app.get("/api/generate")
def api_generate():
    start = normalize_word(request.args.get("start", "", type=str))
    n = request.args.get("len", CFG.DEFAULT_GEN_LEN, type=int)
    if not start:
        return jsonify({"error": "'start' is required"}), 400
    s = _get_engine().generate(start, n)
    return jsonify({"start": start, "complete": s.complete, "words": list(s.words)})


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word Graph • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --danger:#ff5d5d;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; margin-bottom:16px;
}
h1{ font-size:20px; margin:0 0 8px 0 }
h2{ font-size:16px; margin:0 0 8px 0; color:var(--muted) }
.controls{ display:flex; gap:12px; align-items:center; flex-wrap:wrap }
input{
  padding:10px 12px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:15px;
}
input:focus{ border-color:var(--accent) }
input.num{ width:80px }
.btn{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn:hover{ border-color:var(--accent) }
pre{
  margin:12px 0 0 0; padding:12px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; white-space:pre-wrap; min-height:2.5em;
  font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace;
}
.err{ color:var(--danger) }
footer{ margin:26px 0 6px 0; color:var(--muted); font-size:12px; text-align:center }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Word Graph</h1>
      <div id="stats">Loading…</div>
    </div>
    <div class="card">
      <h2>Shortest path</h2>
      <div class="controls">
        <input id="src" placeholder="start word" />
        <input id="dst" placeholder="target word" />
        <button id="go-path" class="btn">Find path</button>
      </div>
      <pre id="out-path"></pre>
    </div>
    <div class="card">
      <h2>Words at exactly N hops</h2>
      <div class="controls">
        <input id="hsrc" placeholder="start word" />
        <input id="hops" class="num" type="number" min="0" value="1" />
        <button id="go-hops" class="btn">List words</button>
      </div>
      <pre id="out-hops"></pre>
    </div>
    <div class="card">
      <h2>Generate</h2>
      <div class="controls">
        <input id="gstart" placeholder="start word" />
        <input id="glen" class="num" type="number" min="1" value="6" />
        <button id="go-gen" class="btn">Generate</button>
      </div>
      <pre id="out-gen"></pre>
    </div>
    <footer>Built with Flask • No external JS/CSS deps</footer>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
async function getJSON(url){
  const resp = await fetch(url);
  const data = await resp.json();
  if(!resp.ok) throw new Error(data.error || `HTTP ${resp.status}`);
  return data;
}
function show(el, text, isErr){
  el.textContent = text;
  el.className = isErr ? "err" : "";
}
async function health(){
  try{
    const h = await getJSON("/api/health");
    $("#stats").textContent = h.ready ? `Nodes: ${h.nodes} • Edges: ${h.edges}` : "Engine not ready.";
  }catch(e){ $("#stats").textContent = `Error: ${e.message}`; }
}
$("#go-path").addEventListener("click", async ()=>{
  const out = $("#out-path");
  try{
    const q = `src=${encodeURIComponent($("#src").value)}&dst=${encodeURIComponent($("#dst").value)}`;
    const r = await getJSON(`/api/path?${q}`);
    if(!r.found){ show(out, `Shortest Path between '${r.src}' and '${r.dst}' does not exist.`); return; }
    show(out, `cost ${r.cost.toFixed(6)} • ${r.hops} hop(s)\n[${r.path.join(", ")}]`);
  }catch(e){ show(out, `Error: ${e.message}`, true); }
});
$("#go-hops").addEventListener("click", async ()=>{
  const out = $("#out-hops");
  try{
    const q = `src=${encodeURIComponent($("#hsrc").value)}&hops=${encodeURIComponent($("#hops").value)}`;
    const r = await getJSON(`/api/hops?${q}`);
    show(out, `${r.count} word(s)\n[${r.words.join(", ")}]`);
  }catch(e){ show(out, `Error: ${e.message}`, true); }
});
$("#go-gen").addEventListener("click", async ()=>{
  const out = $("#out-gen");
  try{
    const q = `start=${encodeURIComponent($("#gstart").value)}&len=${encodeURIComponent($("#glen").value)}`;
    const r = await getJSON(`/api/generate?${q}`);
    show(out, `${r.complete ? "Complete" : "Incomplete"} sentence with ${r.words.length} words:\n${r.words.join(" ")}`);
  }catch(e){ show(out, `Error: ${e.message}`, true); }
});
health();
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the word graph Engine")
    ap.add_argument("-i", "--input", action="append", required=True, help="Text file or folder (repeatable)")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    global _engine
    _engine = Engine()
    _engine.build(args.input, verbose=args.verbose)
    log.info("Serving word graph %r on %s:%d", _engine.graph, args.host, args.port)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0
