from __future__ import annotations

USER_GUIDE_TEMPLATE = """<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" "http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">
<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="en" lang="en">
<head>
  <title>{{ about_text | e }} User's Guide</title>
  <meta http-equiv="Content-Type" content="text/html; charset=utf-8" />
  <style>
  html {
    font-family: Arial;
    font-size: 0.688em;
    line-height: 1.364em;
    background-color: white;
    color: black;
  }
  a {
    color: black;
    text-decoration: underline;
  }
  a:hover {
    text-decoration: none;
  }
  tt {
    font-size: 1.2em;
  }
  h1 {
    text-align: center;
    font-size: 2.6em;
    font-weight: bold;
    padding: 20px 0 20px 0;
    background-color: #e0e0e0;
  }
  h2 {
    text-align: left;
    font-size: 2.5em;
    font-weight: bold;
    padding: 10px 0 10px 0;
    background-color: #e0e0e0;
  }
  h3 {
    text-align: left;
    font-size: 1.75em;
    font-weight: bold;
    padding: 5px 0 2px 0;
    border-bottom: 2px dashed #c0c0c0;
  }
  h4 {
    text-align: left;
    font-size: 1.5em;
    font-weight: bold;
    padding: 5px 0 0 0;
  }
  .clicktoshow {
    display: block;
    font-size: 10px;
    font-weight: normal;
    color: #808080;
  }
  .showable {
    display: none;
  }

  #toc2col .column1 {
    width: 250px;
    padding: 0;
    position: fixed;
    right: 0px;
    top: 0px;
  }
  #toc2col .column2 {
    width: 628px;
    padding: 10px 0 10px 0;
  }

  .box {
    background-color: #c0c0c0;
    width: 210px;
  }
  .box h2 {
    text-align: center;
    font-size: 1.364em;
    line-height: 1em;
    font-weight: bold;
    padding: 3px 0 3px 0;
    margin-top: 40px;
    color: #ffffff;
    background-color: #000000;
  }
  .box ul       { list-style: none; padding: 0; margin: 0; }
  .box ul li    { padding: 5px 0 1px 15px; font-weight: bold; }
  .box ul ul li { padding: 1px 0 1px 30px; font-weight: normal; }

  .man h1 {
    text-align: center;
    font-size: 1.8em;
    line-height: 1em;
    font-weight: bold;
    padding: 3px 0 3px 0;
    margin-top: 5px;
    background-color: #ffffff;
    color: black;
  }
  .man h2 {
    text-align: left;
    font-size: 1.4em;
    line-height: 1em;
    font-weight: bold;
    padding: 3px 0 3px 0;
    margin-top: 20px;
    background-color: #ffffff;
  }

  .vimdoc pre {
    font-size: 1.0em;
    margin-left: 20px;
  }
  </style>
  <script type="text/javascript">
    function setDisplay(selectors, value) {
      var divs = document.querySelectorAll(selectors);
      for (var i = 0; i < divs.length; i++) {
        divs[i].style.display = value;
      }
    }

    function show(id) {
      setDisplay('.showable', 'none');
      setDisplay('.clicktoshow', 'block');
      document.getElementById(id).style.display = 'block';
      document.getElementById(id + '-click').style.display = 'none';
    }

    function showAll() {
      setDisplay('.showable', 'block');
      setDisplay('.clicktoshow', 'none');
    }

    function hideAll() {
      setDisplay('.showable', 'none');
      setDisplay('.clicktoshow', 'block');
    }
  </script>
</head>
<body id="toc2col">
    <div id="middle">
      <div class="container">
        <div class="column1">
          <div class="box">
            <div class="indent">
              <!-- BEGIN TOC -->
              <h2>Getting Started</h2>
              <ul class="toc1">
                <li><a onclick="show('usage-cli');" href="#usage-cli">Command Line Usage</a></li>
                <li><a onclick="show('usage-help');" href="#usage-help">Getting Help</a></li>
              </ul>
              <h2>Features</h2>
              <ul class="toc2">
                {%- for feature in features %}
                <li><a onclick="show('feature-{{ feature.key | e }}');" href="#feature-{{ feature.key | e }}">{{ feature.name | e }}</a></li>
                {%- endfor %}
              </ul>
              <h2>References</h2>
              <ul class="toc2">
                <li><a onclick="show('reference-man');" href="#reference-man">Man Page</a></li>
                <li><a onclick="show('reference-help');" href="#reference-help">Help Reference</a></li>
                <li><a onclick="show('license');" href="#license">License</a></li>
              </ul>
              <p style="text-align: center; font-size: 10px; color: #808080;">
                <a href="#" onclick="showAll();">Show All</a> |
                <a href="#" onclick="hideAll();">Hide All</a>
              </p>
              <!-- END TOC -->
              <br/>
            </div>
          </div>
        </div>
        <div class="column2">
          <div class="indent">
            <!-- BEGIN CONTENT -->
<h1>{{ about_text | e }} User's Guide</h1>
<a name="usage"></a>
<h2>Getting Started</h2>
<a name="usage-cli"></a>
<h3>Command Line Usage</h3>
<div id="usage-cli-click" class="clicktoshow">
  <a href="#usage-cli" onclick="show('usage-cli');">Show&nbsp;&raquo;</a>
</div>
<div id="usage-cli" class="showable">
  <p>Every option and command is described in the <a
  onclick="show('reference-man');" href="#reference-man">man page</a>.  If the
  man page is installed locally, it can also be read from a shell prompt with
  <tt>man</tt>.</p>
</div>
<a name="usage-help"></a>
<h3>Getting Help</h3>
<div id="usage-help-click" class="clicktoshow">
  <a href="#usage-help" onclick="show('usage-help');">Show&nbsp;&raquo;</a>
</div>
<div id="usage-help" class="showable">
  <p>The <a onclick="show('reference-help');" href="#reference-help">help
  reference</a> summarises the same material in plain text, in a form that can
  be installed as editor help.</p>
</div>
<a name="features"></a>
<h2>Features</h2>
<div id="features"></div>
{%- for feature in features %}
<a name="feature-{{ feature.key | e }}"></a>
<h3>{{ feature.name | e }}</h3>
<div id="feature-{{ feature.key | e }}-click" class="clicktoshow">
  <a href="#feature-{{ feature.key | e }}" onclick="show('feature-{{ feature.key | e }}');">Show&nbsp;&raquo;</a>
</div>
<div id="feature-{{ feature.key | e }}" class="showable">
  {{ feature.html_body }}
</div>
{%- endfor %}
<div id="references">
  <a name="references"></a>
  <h2>References</h2>
</div>
<a name="reference-man"></a>
<h3>Man Page</h3>
<div id="reference-man-click" class="clicktoshow">
  <a href="#reference-man" onclick="show('reference-man');">Show&nbsp;&raquo;</a>
</div>
<div id="reference-man" class="showable">
  <div class="man">
    {{ man_page_html }}
  </div>
</div>
<a name="reference-help"></a>
<h3>Help Reference</h3>
<div id="reference-help-click" class="clicktoshow">
  <a href="#reference-help" onclick="show('reference-help');">Show&nbsp;&raquo;</a>
</div>
<div id="reference-help" class="showable">
  <div class="vimdoc">
  {{ vimdoc_html }}
  </div>
</div>
<a name="license"></a>
<h3>License</h3>
<div id="license-click" class="clicktoshow">
  <a href="#license" onclick="show('license');">Show&nbsp;&raquo;</a>
</div>
<div id="license" class="showable">
  <p>Copyright &copy; the {{ about_text | e }} authors.  All rights reserved.</p>
  <p>Redistribution and use in source and binary forms, with or without modification, are permitted provided that the following conditions are met:</p>
  <p>1. Redistributions of source code must retain the above copyright notice, this list of conditions and the following disclaimer.</p>
  <p>2. Redistributions in binary form must reproduce the above copyright notice, this list of conditions and the following disclaimer in the documentation and/or other materials provided with the distribution.</p>
  <p>3. Neither the name of the copyright holder nor the names of its contributors may be used to endorse or promote products derived from this software without specific prior written permission.</p>
  <p>THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.</p>
</div>
            <!-- END CONTENT -->
          </div>
        </div>
      </div>
    </div>
</body>
</html>
"""

__all__ = ["USER_GUIDE_TEMPLATE"]
