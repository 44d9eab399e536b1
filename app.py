"""
Peak sun hours web server
"""
import os

from peak_sun_hours.web import create_app

app = create_app()

# Run the web server
if __name__ == '__main__':
    port = int(os.environ.get('PORT', app.config['PORT']))
    print(f"\n🌞 Peak sun hours report server started")
    print(f"🌍 Port: {port}")
    print(f"🔗 PVGIS endpoint: {app.config['PVGIS_BASE_URL']}{app.config['PVGIS_CALC_PATH']}")
    print(f"\n📊 API endpoints:")
    print(f"   GET  /api/calculate?lat=&lon=&tilt=&azimuth= - run a calculation")
    print(f"   GET  /api/report - current result")
    print(f"   GET  /download/report - {app.config['REPORT_FILENAME']}")
    print(f"   GET  /download/data?format=csv|json|excel - monthly data")

    app.run(host='0.0.0.0', port=port, debug=app.config['FLASK_DEBUG'])
