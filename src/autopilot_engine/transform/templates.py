"""Text assets spliced into project files.

AUTOPILOT_BLOCK replaces the value of every matched ``initialSequence``
property. CONTROLS_HTML is appended to the companion markup file once;
CONTROLS_MARKER is the substring whose presence means it is already there.
"""

AUTOPILOT_BLOCK = """{
  mandatory: true,
  movements: [
    {
      targetYaw: 179,
      targetPitch: 0,
      path: "longest",
      duration: 2000,
      easing: "cubic_in_out",
      class: "TargetPanoramaCameraMovement"
    }
  ],
  class: "PanoramaCameraSequence"
}"""

CONTROLS_MARKER = "autopilot-controls"

CONTROLS_HTML = """
    <div id="autopilot-controls">
      <button onclick="enableAutopilot()">Enable Autopilot</button>
      <button onclick="disableAutopilot()">Disable Autopilot</button>
    </div>

    <script>
      var devicesUrl = { general: "script_general.js" };
      async function enableAutopilot() {
        await fetch("/enable-autopilot", { method: "POST" });
        localStorage.setItem("autopilotEnabled", "true");
        devicesUrl.general = "modified_script_general.js?v=" + Date.now();
        window.location.reload();
      }
      async function disableAutopilot() {
        await fetch("/disable-autopilot", { method: "POST" });
        localStorage.setItem("autopilotEnabled", "false");
        devicesUrl.general = "script_general.js?v=" + Date.now();
        window.location.reload();
      }
      (function init() {
        const mode = localStorage.getItem("autopilotEnabled");
        devicesUrl.general = (mode === "true" ? "modified_script_general.js" : "script_general.js") + "?v=" + Date.now();
      })();
    </script>

    <style>
      #autopilot-controls {
        position: fixed;
        bottom: 20px;
        left: 20px;
        z-index: 999;
        display: flex;
        flex-direction: column;
        gap: 10px;
      }
      #autopilot-controls button {
        padding: 10px 15px;
        background: #0f172a;
        color: #fff;
        border: none;
        border-radius: 6px;
        cursor: pointer;
        font-size: 14px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.3);
        transition: background 0.2s;
      }
      #autopilot-controls button:hover {
        background: #1e293b;
      }
    </style>"""
