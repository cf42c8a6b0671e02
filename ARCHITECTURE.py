"""
Architecture Diagram

Visual representation of the ASCII camera pipeline.
"""

print(r"""
╔══════════════════════════════════════════════════════════════════════════╗
║                      ASCII CAMERA PIPELINE ARCHITECTURE                  ║
╚══════════════════════════════════════════════════════════════════════════╝

┌──────────────────────────────────────────────────────────────────────────┐
│                          CAPTURE LOOP (main.py)                          │
├──────────────────────────────────────────────────────────────────────────┤
│  FrameSource.capture_next_frame()  ──►  AsciiArtPipeline.process_frame() │
│  clear_terminal() + write_ascii()  ◄──  results['ascii_art']             │
│  display('Combined', canvas)       ◄──  visualize_results()              │
│  display('Ascii size', colors)     ◄──  results['block_colors']          │
│  read_key() == 'q'  ──►  exit 0                                          │
└──────────────────────────────────────────────────────────────────────────┘
                                     │
                                     ▼
┌──────────────────────────────────────────────────────────────────────────┐
│                          STAGES (modules/)                               │
├──────────────────────────────────────────────────────────────────────────┤
│                                                                          │
│  frame (BGR) ─┬─► Smoother ──► LuminanceReducer ──► GradientAnalyzer     │
│               │   3x3 blur     BGR2GRAY             gx, gy, angle        │
│               │                                     votes per 4x4 block  │
│               │                                          │ edge grid     │
│               │                                          ▼               │
│               └─► BlockSampler ─────────────────► GlyphComposer          │
│                   top-left pixel per block        edge glyph  or         │
│                                                   luminance ramp glyph   │
│                                                   + ESC[38;2;R;G;Bm      │
│                                                                          │
│  visualization.combine_stages: original | smoothed                       │
│                                gray     | gradient magnitude             │
│                                                                          │
└──────────────────────────────────────────────────────────────────────────┘

┌──────────────────────────────────────────────────────────────────────────┐
│                      CONFIGURATION (config.py)                           │
├──────────────────────────────────────────────────────────────────────────┤
│  BLOCK_SIZE = 4, GRADIENT_THRESHOLD = 15.0, ASCII_CHARS, EDGE_CHARS      │
│  PipelineConfig: SMOOTHING, LUMINANCE, GRADIENT, BLOCKS, GLYPHS, DISPLAY │
└──────────────────────────────────────────────────────────────────────────┘

Edge buckets (vote order, ties go to the lower index):
    0  '_'   vertical gradient
    1  '/'   rising diagonal
    2  '\'   falling diagonal
    3  '|'   horizontal gradient

Debug a still image:
    python visualize/viz_stages.py path/to/images
""")
