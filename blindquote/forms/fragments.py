"""
Interactive fragments injected into generated quotes.

These are browser-side controls (print, copy-as-HTML with CSS inlining,
email copy + GST toggle). Python never interprets them; the assembler
injects them verbatim at fixed positions.
"""

# Detailed quote: goes right after <body>
ACTION_BAR_HTML = """
    <div id="action-bar">
        <button id="copy-html-btn">Copy HTML</button>
        <button id="print-btn">Print / Save PDF</button>
    </div>"""

# Detailed quote: goes right before </body>
PRINT_SCRIPT_HTML = """
    <script>
        document.addEventListener('DOMContentLoaded', function() {
            const copyBtn = document.getElementById('copy-html-btn');
            const printBtn = document.getElementById('print-btn');

            if (printBtn) {
                printBtn.addEventListener('click', function() {
                    window.print();
                });
            }

            const getInlinedHtml = () => {
                const clone = document.documentElement.cloneNode(true);
                Array.from(document.styleSheets).forEach(sheet => {
                    try {
                        Array.from(sheet.cssRules).forEach(rule => {
                            const selector = rule.selectorText;
                            if (!selector) return;
                            clone.querySelectorAll(selector).forEach(el => {
                                const existingStyle = el.getAttribute('style') || '';
                                el.setAttribute('style', rule.style.cssText + existingStyle);
                            });
                        });
                    } catch (e) {
                        console.warn('Could not process a stylesheet:', e.message);
                    }
                });
                clone.querySelector('#action-bar')?.remove();
                clone.querySelector('script')?.remove();
                return '<!DOCTYPE html>' + clone.outerHTML;
            };

            if (copyBtn) {
                copyBtn.addEventListener('click', function() {
                    copyBtn.textContent = 'Processing...';
                    copyBtn.disabled = true;
                    setTimeout(() => {
                        try {
                            navigator.clipboard.writeText(getInlinedHtml())
                                .then(() => {
                                    alert('HTML with inlined styles copied to clipboard successfully!');
                                })
                                .catch(err => {
                                    console.error('Failed to copy with navigator.clipboard:', err);
                                    alert('Failed to copy. Please check console for errors.');
                                });
                        } catch (err) {
                            console.error('Error during CSS inlining process:', err);
                            alert('An error occurred while preparing the HTML. See console for details.');
                        } finally {
                            copyBtn.textContent = 'Copy HTML';
                            copyBtn.disabled = false;
                        }
                    }, 50);
                });
            }
        });
    </script>"""

# Email quote: copy bar + GST toggle, goes right before </body>
GMAIL_SCRIPT_HTML = """
    <div id="action-bar-gth" style="position: fixed; bottom: 10px; left: 50%; transform: translateX(-50%); z-index: 10001; padding: 10px; background: rgba(0,0,0,0.7); border-radius: 8px;">
        <button id="btn-copy-gth" style="padding: 10px 20px; font-size: 16px; font-weight: bold; color: #333; background-color: #fffacd; border: 1px solid #ccc; border-radius: 5px; cursor: pointer;">Copy2G</button>
    </div>
    <script>
        const formatCurrency = (value) => isNaN(value) ? '$0.00' : '$' + value.toFixed(2);

        document.addEventListener('DOMContentLoaded', function() {
            const gstRow = document.getElementById('gth-gst-row');
            const totalValueEl = document.getElementById('gth-total');
            const depositValueEl = document.getElementById('gth-deposit');
            const balanceValueEl = document.getElementById('gth-balance');
            const tableBody = document.getElementById('gth-summary-table')?.querySelector('tbody');

            if (!gstRow || !totalValueEl || !depositValueEl || !balanceValueEl || !tableBody) {
                console.warn('GTH: Could not find all elements for GST toggle.');
                return;
            }

            let isGstVisible = true;
            const ourOffer = parseFloat(tableBody.dataset.ourOffer);
            const grandTotal = parseFloat(tableBody.dataset.total);

            const updateValues = (includeGst) => {
                const base = includeGst ? grandTotal : ourOffer;
                gstRow.style.display = includeGst ? '' : 'none';
                totalValueEl.textContent = formatCurrency(base);
                depositValueEl.textContent = formatCurrency(base * 0.5);
                balanceValueEl.textContent = formatCurrency(base * 0.5);
            };

            gstRow.addEventListener('click', function() {
                isGstVisible = !isGstVisible;
                updateValues(isGstVisible);
            });
        });

        document.getElementById('btn-copy-gth').addEventListener('click', function() {
            const btn = this;
            const reset = () => { btn.textContent = 'Copy2G'; btn.disabled = false; };
            btn.textContent = 'Copying...';
            btn.disabled = true;

            try {
                const clone = document.documentElement.cloneNode(true);
                clone.querySelector('#action-bar-gth')?.remove();
                clone.querySelector('script')?.remove();
                clone.querySelector('title')?.remove();

                // Copy always carries the GST-inclusive figures
                const clonedGstRow = clone.querySelector('#gth-gst-row');
                if (clonedGstRow && clonedGstRow.style.display === 'none') {
                    clonedGstRow.style.display = '';
                    const tableBody = clone.querySelector('#gth-summary-table tbody');
                    const grandTotal = parseFloat(tableBody.dataset.total);
                    clone.querySelector('#gth-total').textContent = formatCurrency(grandTotal);
                    clone.querySelector('#gth-deposit').textContent = formatCurrency(grandTotal * 0.5);
                    clone.querySelector('#gth-balance').textContent = formatCurrency(grandTotal * 0.5);
                }

                navigator.clipboard.writeText(clone.outerHTML)
                    .then(function() {
                        alert('Quote HTML Source copied to clipboard!');
                        reset();
                    }).catch(function(err) {
                        console.error('Failed to copy HTML source: ', err);
                        alert('Error: Could not copy to clipboard. See console.');
                        reset();
                    });
            } catch (err) {
                console.error('Error preparing HTML source copy: ', err);
                alert('An error occurred during copy. See console.');
                reset();
            }
        });
    </script>"""
